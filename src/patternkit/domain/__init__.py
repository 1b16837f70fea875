"""Domain layer - products, builders, prototypes and composite trees."""
