"""Calendar-aware task planning: turns estimated work items into a dated schedule."""
