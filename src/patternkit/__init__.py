"""patternkit - object construction and composition toolkit.

Provides four in-memory building blocks:
    - Family registry: consistent families of related products (abstract factory)
    - Stepwise assembler: ordered builder steps producing one product (builder)
    - Template registry: independent copies of stored templates (prototype)
    - Composite trees: leaves and containers with aggregate operations (composite)

Layout:
    - domain: product, builder, prototype and tree models and their errors
    - infrastructure: the family and template registries
    - config: pydantic configuration schemas and loading
    - catalog: sample products used by the bootstrap and the tests
"""

__version__ = "0.1.0"

from patternkit.bootstrap import Toolkit, create_toolkit

__all__ = ["Toolkit", "create_toolkit", "__version__"]
