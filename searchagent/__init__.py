"""
searchagent - pluggable web search backends for agents.
"""

__version__ = "0.1.0"
