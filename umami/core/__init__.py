"""Core building blocks: configuration, enums, exceptions, logging and protocols."""
