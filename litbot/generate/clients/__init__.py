# Model clients: gateway (production) and echo (local dev).
