"""Festival CMS: public site, admin content API, registrations and monitoring."""
