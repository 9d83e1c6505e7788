"""Subway network: line topology and distance-based fares."""
