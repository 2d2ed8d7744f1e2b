"""Infrastructure layer - storage and collaborator implementations."""
