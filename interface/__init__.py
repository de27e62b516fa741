"""Front ends for the oxo engine: REST API and terminal game."""
