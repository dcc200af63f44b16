"""
Movies API service
"""
