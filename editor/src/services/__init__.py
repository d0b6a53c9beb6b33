"""Image processing services"""
