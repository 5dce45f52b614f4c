"""Domain layer: schema entities and the services that build and check them."""
