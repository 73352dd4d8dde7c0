"""Shared fixtures for storage-headers tests."""

from __future__ import annotations

import os
import tempfile

import boto3
import pytest
from moto import mock_aws


@pytest.fixture()
def text_bytes() -> bytes:
    return b"id,name\n1,example\n"


# ---------------------------------------------------------------------------
# Temporary file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture()
def tmp_csv_file(tmp_dir: str, text_bytes: bytes) -> str:
    """Write text_bytes to a temp CSV file and return its path."""
    p = os.path.join(tmp_dir, "export.csv")
    with open(p, "wb") as f:
        f.write(text_bytes)
    return p


# ---------------------------------------------------------------------------
# Moto S3 fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def aws_credentials(monkeypatch: pytest.MonkeyPatch):
    """Set dummy AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture()
def s3_mock(aws_credentials):
    """Provide a mocked S3 service via moto."""
    with mock_aws():
        yield


@pytest.fixture()
def s3_bucket(s3_mock) -> str:
    """Create and return an S3 bucket name inside the moto mock."""
    bucket_name = "test-bucket"
    client = boto3.client("s3", region_name="us-east-1")
    client.create_bucket(Bucket=bucket_name)
    return bucket_name


@pytest.fixture()
def s3_client(s3_mock):
    return boto3.client("s3", region_name="us-east-1")
