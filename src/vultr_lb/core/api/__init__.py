"""Vultr REST API transport and resource clients."""
