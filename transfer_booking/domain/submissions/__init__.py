"""Shared persistence and submission pipeline for public request forms"""
