"""Core configuration, logging, and shared collaborators"""
