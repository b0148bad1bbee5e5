"""Infrastructure layer — platform entropy and password hashing."""
