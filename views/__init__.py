"""Server-rendered presentational components (Jinja2 templates)."""
