"""Shared helpers: history, coordinate transforms, errors and logging"""
