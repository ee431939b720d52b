"""Configuration, logging and dataset loading."""
