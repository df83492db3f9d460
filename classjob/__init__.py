"""Lodestone class/job profile scraper."""
