"""Infrastructure-side configuration (env/.env driven)."""
