"""Infrastructure adapters (persistence, security, e-mail, logging)."""
