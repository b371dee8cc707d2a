"""Ladenkonto - Mehrwegladen-Verwaltung"""
