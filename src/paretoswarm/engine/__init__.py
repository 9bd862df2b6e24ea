"""Optimizer engine: OMOPSO loop, archive selection and run configuration."""
