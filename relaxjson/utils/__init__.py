"""Configuration helpers for relaxjson."""
