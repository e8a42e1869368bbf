"""Domain layer - Business logic with no infrastructure dependencies."""
