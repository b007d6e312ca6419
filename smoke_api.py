#!/usr/bin/env python3
"""Quick smoke check against a running Trip Fuel Calculator API.

Usage:
    python smoke_api.py [API_URL]      (default: http://localhost:8000)
"""

import sys

import requests

API_URL = sys.argv[1].rstrip("/") if len(sys.argv) > 1 else "http://localhost:8000"

print("=" * 60)
print(f"Smoke-testing Trip Fuel Calculator API at {API_URL}")
print("=" * 60)
print()

# 1. Health check
print("1. Health check...")
try:
    health = requests.get(f"{API_URL}/health", timeout=10)
    print(f"   ✓ Status: {health.status_code}")
    print(f"   ✓ Response: {health.json()}")
except Exception as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

# 2. Catalog
print("2. Listing available vehicles...")
try:
    vehicles = requests.get(f"{API_URL}/vehicles", params={"available_only": "true"}, timeout=10)
    v_data = vehicles.json()
    print(f"   ✓ Status: {vehicles.status_code}")
    for v in v_data:
        print(f"     - {v['id']:10s} {v['name']} ({v['model']}) {v['consumption_rate']} L/100km")
except Exception as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

# 3. Cost for a two-car trip
print("3. Computing a two-car trip...")
try:
    cost = requests.post(
        f"{API_URL}/trip/cost",
        json={
            "primary_vehicle_id": "mario",
            "secondary_vehicle_id": "maribel",
            "use_second_vehicle": True,
            "distance": 100,
            "passenger_count": 3,
        },
        timeout=10,
    )
    c_data = cost.json()
    print(f"   ✓ Status: {cost.status_code}")
    for key, val in c_data["display"].items():
        print(f"     - {key}: {val}")
except Exception as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

# 4. Validation errors come back per field
print("4. Sending an invalid trip...")
try:
    bad = requests.post(f"{API_URL}/trip/cost", json={"distance": 0}, timeout=10)
    print(f"   ✓ Status: {bad.status_code} (expected 422)")
    for issue in bad.json()["detail"]:
        print(f"     - {issue['field']}: {issue['message']}")
except Exception as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

# 5. Share message
print("5. Rendering the share message...")
try:
    summary = requests.post(
        f"{API_URL}/trip/summary",
        json={"trip": {"primary_vehicle_id": "canton", "distance": 60, "round_trip": True, "passenger_count": 4}},
        timeout=10,
    )
    s_data = summary.json()
    print(f"   ✓ Status: {summary.status_code}")
    print("   ✓ Message:")
    for line in s_data["text"].splitlines():
        print(f"     {line}")
    print(f"   ✓ Share URL length: {len(s_data['share_url'])} chars")
except Exception as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

print("=" * 60)
print("✓ All checks passed.")
print("=" * 60)
