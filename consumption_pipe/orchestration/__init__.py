"""
Orchestration Layer - Workflow Coordination

- Pure workflow coordination
- No business logic
- Composes extract, transform, and load operations
"""
