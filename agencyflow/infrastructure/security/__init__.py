"""Security: JWT verification for tokens issued by the auth provider."""
