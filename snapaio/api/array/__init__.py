"""Array module - invoking the array tool and reading its configuration."""
