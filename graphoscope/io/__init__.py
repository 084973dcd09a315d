"""
Import module for Graphoscope.

Reads external edge-list files into a DiGraph.
"""

from graphoscope.io.edgelist import read_edge_list, parse_edge_list

__all__ = ["read_edge_list", "parse_edge_list"]
