"""Application ports package."""
