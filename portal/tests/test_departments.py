"""
Integration tests for the department endpoints.

These exercise the uniform create/list/update/delete contract that every
portal resource follows: defaults, conflict and not-found translation,
identifier immutability and the error envelope.

To run the tests:

```
pytest -q portal/tests
```
"""

from rest_framework import status
from rest_framework.test import APITestCase

from portal.models import Department


class DepartmentAPITests(APITestCase):
    def setUp(self) -> None:
        self.existing = Department.objects.create(id="EE", name="Electrical Engineering")

    def test_create_returns_created_record_with_defaults(self):
        response = self.client.post(
            "/api/departments", {"id": "CS", "name": "Computer Science"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["id"], "CS")
        self.assertEqual(response.data["name"], "Computer Science")
        self.assertIs(response.data["isActive"], True)
        self.assertIn("createdAt", response.data)
        self.assertTrue(Department.objects.filter(id="CS").exists())

    def test_repeated_create_conflicts(self):
        payload = {"id": "CS", "name": "Computer Science"}
        first = self.client.post("/api/departments", payload, format="json")
        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        second = self.client.post("/api/departments", payload, format="json")
        self.assertEqual(second.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(second.data["ok"], False)
        self.assertEqual(second.data["error"]["code"], "already_exists")
        self.assertEqual(second.data["error"]["message"], "Department with this ID already exists")

    def test_conflicting_create_leaves_existing_record_unchanged(self):
        response = self.client.post(
            "/api/departments", {"id": "EE", "name": "Overwritten", "isActive": False}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.existing.refresh_from_db()
        self.assertEqual(self.existing.name, "Electrical Engineering")
        self.assertTrue(self.existing.is_active)

    def test_create_requires_id_and_name(self):
        response = self.client.post("/api/departments", {"name": ""}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "validation_error")
        self.assertIn("id", response.data["error"]["message"])
        self.assertIn("name", response.data["error"]["message"])
        self.assertEqual(Department.objects.count(), 1)

    def test_names_with_ampersands_are_stored_as_written(self):
        response = self.client.post(
            "/api/departments", {"id": "RD", "name": "Research & Development"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["name"], "Research & Development")
        self.assertEqual(Department.objects.get(id="RD").name, "Research & Development")
        listing = self.client.get("/api/departments")
        self.assertIn("Research & Development", [d["name"] for d in listing.data])

    def test_name_made_only_of_markup_is_rejected(self):
        response = self.client.post("/api/departments", {"id": "X", "name": "<b></b>"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("name", response.data["error"]["message"])
        self.assertFalse(Department.objects.filter(id="X").exists())

    def test_create_rejects_unknown_fields(self):
        response = self.client.post(
            "/api/departments", {"id": "CS", "name": "Computer Science", "budget": 10}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("budget", response.data["error"]["message"])
        self.assertFalse(Department.objects.filter(id="CS").exists())

    def test_create_rejects_non_object_body(self):
        response = self.client.post("/api/departments", [{"id": "CS"}], format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_is_ordered_by_name_and_includes_inactive(self):
        Department.objects.create(id="AR", name="Architecture", is_active=False)
        Department.objects.create(id="ME", name="Mechanical Engineering")
        response = self.client.get("/api/departments")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [d["name"] for d in response.data]
        self.assertEqual(names, ["Architecture", "Electrical Engineering", "Mechanical Engineering"])

    def test_update_changes_fields_but_not_identifier(self):
        response = self.client.put(
            "/api/departments/EE", {"id": "XX", "name": "EEE", "isActive": False}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], "EE")
        self.assertEqual(response.data["name"], "EEE")
        self.assertIs(response.data["isActive"], False)
        self.assertFalse(Department.objects.filter(id="XX").exists())

    def test_partial_update_keeps_other_fields(self):
        response = self.client.put("/api/departments/EE", {"isActive": False}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.existing.refresh_from_db()
        self.assertEqual(self.existing.name, "Electrical Engineering")
        self.assertFalse(self.existing.is_active)

    def test_update_missing_record_is_not_found_and_creates_nothing(self):
        response = self.client.put("/api/departments/NOPE", {"name": "Ghost"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"]["code"], "not_found")
        self.assertEqual(response.data["error"]["message"], "Department not found")
        self.assertFalse(Department.objects.filter(id="NOPE").exists())

    def test_delete_then_delete_again(self):
        response = self.client.delete("/api/departments/EE")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(response.content, b"")
        self.assertFalse(Department.objects.filter(id="EE").exists())
        again = self.client.delete("/api/departments/EE")
        self.assertEqual(again.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Department.objects.count(), 0)
