"""Simulation configuration"""
