"""Settlers board game engine, text view and console front end."""
