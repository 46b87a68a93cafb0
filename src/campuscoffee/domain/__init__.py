"""Domain layer for CampusCoffee.

Contains the domain model, the data-access ports and the services built on
top of them. This layer has no dependencies on infrastructure concerns.
"""
