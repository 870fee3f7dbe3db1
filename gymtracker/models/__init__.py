"""Data models for gymtracker."""

from gymtracker.models.user import User, UpsertUser
from gymtracker.models.gym_class import GymClass, GymClassCreate, GymClassUpdate

__all__ = [
    "User",
    "UpsertUser",
    "GymClass",
    "GymClassCreate",
    "GymClassUpdate",
]
