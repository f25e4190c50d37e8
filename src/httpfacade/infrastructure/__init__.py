"""Infrastructure: HTTP transport and body codecs."""
