"""Infrastructure: Firestore, cache, security, outbound e-mail."""
