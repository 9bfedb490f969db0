"""Audit IAM users for access keys that have gone unused."""
