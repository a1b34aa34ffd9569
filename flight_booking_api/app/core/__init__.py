"""Configuration, logging, storage and error primitives shared by all layers."""
