"""Configuration, persistence, security and the shared resource pipeline."""
