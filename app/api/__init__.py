"""HTTP API: versioned REST routes, cron and live endpoints."""
