"""Components layer - domain logic modules.

Components are leaf modules that:
- Do NOT import services or interfaces
- ARE imported and used BY services
- May import from: helpers, other components

Architecture:
- helpers/ = stdlib-only utilities and DTOs (pure, stateless)
- components/ = domain logic building blocks (this layer)
- services/ = wiring, long-lived resources, file loading
- interfaces/ = API contracts and HTTP error mapping
"""
