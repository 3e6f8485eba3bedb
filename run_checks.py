from fastapi.testclient import TestClient
from app.main import app

# Context manager runs the startup event, so demo data is seeded
with TestClient(app) as client:
    print('ROOT:')
    print(client.get('/').json())

    print('\nHEALTH:')
    print(client.get('/health').json())

    print('\nDB HEALTH:')
    resp = client.get('/health/db')
    print(resp.status_code)
    print(resp.json())

    print('\nVERIFY DEMO IDENTITY:')
    resp = client.get('/api/blockchain/verify/TSM-A1B2C3D4E5F6G7H8I9J0K1L2M3N4O5P6')
    print(resp.status_code)
    print(resp.json())
