"""Classify and summarize the changes described by a Terraform plan."""

__version__ = "0.1.0"
