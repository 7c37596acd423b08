"""Ports, controller and app state shared by every frontend."""
