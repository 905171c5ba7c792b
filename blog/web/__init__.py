"""
Server-rendered frontend for the blog
"""
