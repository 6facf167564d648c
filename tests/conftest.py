"""Shared test fixtures for tfscope tests."""

import pytest

EXAMPLE_TF = """\
resource "aws_instance" "web" {
  ami = "ami-1"
}
resource "aws_s3_bucket" "logs" {
  bucket = aws_instance.web.id
}
"""

NETWORK_TF = """\
resource "aws_vpc" "main" {
  cidr_block = "10.0.0.0/16"
}

resource "aws_subnet" "a" {
  vpc_id = aws_vpc.main.id
}

resource "aws_instance" "web" {
  ami           = "ami-1"
  instance_type = "t3.micro"
  subnet_id     = aws_subnet.a.id
}

module "dns" {
  source = "./modules/dns"
  target = aws_instance.web.public_ip
}

resource "google_storage_bucket" "assets" {
  name = "assets"
}

resource "null_resource" "hook" {
  depends_on = [google_storage_bucket.assets]
}
"""

CYCLE_TF = """\
resource "null_resource" "a" {
  trigger = null_resource.b.id
}
resource "null_resource" "b" {
  trigger = null_resource.a.id
}
"""


@pytest.fixture
def example_tf() -> str:
    return EXAMPLE_TF


@pytest.fixture
def network_tf() -> str:
    return NETWORK_TF


@pytest.fixture
def cycle_tf() -> str:
    return CYCLE_TF
