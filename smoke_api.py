#!/usr/bin/env python3
"""
Smoke test for a running portal server.

Walks every route once (create, list, update, delete per resource plus
the student and officer login flows) and prints a summary.  Run against
a development server, e.g.::

    python manage.py runserver
    python smoke_api.py --base-url http://127.0.0.1:8000
"""
import argparse
import sys
import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests


@dataclass
class SmokeResult:
    success: bool
    endpoint: str
    method: str
    status_code: int
    response_time: float
    error_message: str = ""
    description: str = ""


class PortalSmokeTester:
    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        self.results: List[SmokeResult] = []
        self.suffix = uuid.uuid4().hex[:6]

    def call(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None,
             expected_status: int = 200, description: str = "") -> SmokeResult:
        url = f"{self.base_url}{endpoint}"
        start_time = time.time()
        try:
            response = self.session.request(method.upper(), url, json=data, timeout=10)
            response_time = time.time() - start_time
            ok = response.status_code == expected_status
            result = SmokeResult(
                success=ok,
                endpoint=endpoint,
                method=method.upper(),
                status_code=response.status_code,
                response_time=response_time,
                error_message="" if ok else response.text[:200],
                description=description,
            )
        except requests.RequestException as e:
            result = SmokeResult(
                success=False,
                endpoint=endpoint,
                method=method.upper(),
                status_code=0,
                response_time=time.time() - start_time,
                error_message=str(e),
                description=description,
            )
        mark = "PASS" if result.success else "FAIL"
        print(f"[{mark}] {result.method} {endpoint} -> {result.status_code} ({result.response_time:.2f}s) {description}")
        self.results.append(result)
        return result

    def crud(self, prefix: str, record: Dict[str, Any], update: Dict[str, Any]) -> None:
        self.call("POST", prefix, record, 201, "create")
        self.call("POST", prefix, record, 409, "duplicate create")
        self.call("GET", prefix, None, 200, "list")
        self.call("PUT", f"{prefix}/{record['id']}", update, 200, "update")
        self.call("DELETE", f"{prefix}/{record['id']}", None, 204, "delete")
        self.call("DELETE", f"{prefix}/{record['id']}", None, 404, "delete again")

    def run(self) -> bool:
        s = self.suffix
        self.call("GET", "/health", description="liveness")
        self.call("GET", "/api/health", description="api liveness")
        self.call("GET", "/api/unknown-route", expected_status=404, description="catch-all")

        self.crud("/api/departments", {"id": f"D{s}", "name": "Smoke Department"}, {"name": "Renamed"})
        self.crud("/api/coordinators", {
            "id": f"C{s}", "name": "Smoke Coordinator", "email": f"c{s}@example.edu",
            "phone": "9000000000", "department": "Smoke", "position": "Lead",
        }, {"position": "Head"})
        self.crud("/api/programs", {
            "id": f"P{s}", "title": "Smoke Program", "startDate": "2030-01-01", "endDate": "2030-01-02",
            "maxParticipants": 10, "department": "Smoke", "coordinator": f"C{s}",
        }, {"endDate": "2030-01-03"})
        self.call("POST", "/api/homepage-images", {"id": f"bad{s}", "url": "http://x/1.png", "type": "top"},
                  400, "invalid image type")
        self.crud("/api/homepage-images", {"id": f"I{s}", "url": "http://x/1.png", "type": "left"}, {"order": 2})
        self.crud("/api/student-reports", {
            "id": f"R{s}", "studentId": f"S{s}", "studentName": "Smoke Student", "department": "Smoke", "year": "1",
        }, {"activities": [{"name": "Smoke"}]})

        student = {
            "id": f"S{s}", "name": "Smoke Student", "email": f"s{s}@example.edu", "phone": "9000000001",
            "department": "Smoke", "year": "1", "enrollmentNumber": f"EN{s}",
        }
        self.call("POST", "/api/students", student, 201, "create student without password")
        self.call("POST", "/api/students/login", {"email": student["email"], "password": "x"}, 401,
                  "login before password is set")
        self.call("POST", "/api/students/set-password", {
            "email": student["email"], "enrollmentNumber": student["enrollmentNumber"], "password": "first-pass",
        }, 200, "set password")
        self.call("POST", "/api/students/change-password", {
            "email": student["email"], "currentPassword": "first-pass", "newPassword": "second-pass",
        }, 200, "change password")
        self.call("POST", "/api/students/login", {"email": student["email"], "password": "second-pass"}, 200,
                  "login")
        self.call("DELETE", f"/api/students/{student['id']}", None, 204, "delete student")

        officer = {"id": f"O{s}", "username": f"officer{s}", "passwordHash": "secret", "name": "Smoke Officer",
                   "email": f"o{s}@example.edu"}
        self.call("POST", "/api/officers", officer, 201, "create officer")
        self.call("POST", "/api/officers/login", {"username": officer["username"], "passwordHash": "secret"}, 200,
                  "officer login")
        self.call("DELETE", f"/api/officers/{officer['id']}", None, 204, "delete officer")

        failed = [r for r in self.results if not r.success]
        print(f"\n{len(self.results) - len(failed)}/{len(self.results)} checks passed")
        for r in failed:
            print(f"  - {r.method} {r.endpoint}: {r.status_code} {r.error_message}")
        return not failed


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke test a running portal server.")
    parser.add_argument("--base-url", default="http://127.0.0.1:8000")
    args = parser.parse_args()
    return 0 if PortalSmokeTester(args.base_url).run() else 1


if __name__ == "__main__":
    sys.exit(main())
