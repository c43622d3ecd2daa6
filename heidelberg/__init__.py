"""Scroll-synchronized Heidelberg Catechism reader."""
