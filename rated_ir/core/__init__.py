"""Core of rated-ir: domain model, collaborator ports and services."""
