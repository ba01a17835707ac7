"""Practices for JavaScript and TypeScript projects."""
