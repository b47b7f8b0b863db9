"""Simulation nodes"""
