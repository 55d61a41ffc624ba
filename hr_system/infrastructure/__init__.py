"""Adapters de infraestructura: Postgres, Redis, reloj e in-memory."""
