"""Configuration dictionaries"""
