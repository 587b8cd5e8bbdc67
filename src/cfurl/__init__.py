"""Quick access to Cloudflare dashboard pages."""

__version__ = "0.1.0"
