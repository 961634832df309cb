"""yamlset subcommands."""
