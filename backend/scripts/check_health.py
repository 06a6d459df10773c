import os
import requests

BASE_URL = os.getenv("API_URL", "http://localhost:8000")

try:
    print(f"Checking server URL: {BASE_URL}/health")
    r = requests.get(f"{BASE_URL}/health", timeout=2)
    print(f"Status Code: {r.status_code}")
    if r.status_code == 200:
        print(f"Server is UP and reachable: {r.json()}")
    else:
        print("Server returned unexpected status.")
except requests.RequestException as e:
    print(f"Server unreachable: {e}")
