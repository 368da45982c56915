"""Configuration, XDG paths and theming for the CLI."""
