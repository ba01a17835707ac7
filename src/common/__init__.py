"""Shared helpers used across AuditGate modules."""
