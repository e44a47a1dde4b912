"""Server-rendered public site: page renderers (site, layout) and routes."""
