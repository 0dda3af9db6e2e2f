"""
Fleet app - organization driver and vehicle rosters.
"""
