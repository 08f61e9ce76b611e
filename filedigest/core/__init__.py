"""Core infrastructure: exceptions, configuration, interfaces and the service container."""
