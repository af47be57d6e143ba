"""Version 1 of the Codeython API."""
