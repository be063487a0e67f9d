import unittest
from unittest.mock import patch

from sqlalchemy.exc import SQLAlchemyError

from fittrack.api.auth import get_current_user_id
from tests.base import APITestCase

MISSING_ID = "60b6e9e8b6a12345678e9f99"


class FitnessGoalTestCase(APITestCase):
    def setUp(self) -> None:
        super().setUp()
        # simulate an authenticated user
        self.override(get_current_user_id, "mockUserId")

    def create_goal(self, **fields) -> dict:
        response = self.client.post("/fitnessGoals", json=fields)
        self.assertEqual(response.status_code, 200)
        return response.json()

    def test_create_goal(self) -> None:
        response = self.client.post(
            "/fitnessGoals",
            json={"goalType": "Weight Loss", "target": 10, "timeline": "3 months"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["goalType"], "Weight Loss")
        self.assertEqual(body["target"], 10)
        self.assertEqual(body["timeline"], "3 months")
        self.assertEqual(body["userId"], "mockUserId")
        self.assertRegex(body["id"], r"^[0-9a-f]{24}$")

    def test_owner_comes_from_identity_not_body(self) -> None:
        goal = self.create_goal(
            goalType="Endurance", target=5, timeline="1 month", userId="someoneElse"
        )
        self.assertEqual(goal["userId"], "mockUserId")

    def test_get_all_goals(self) -> None:
        self.assertEqual(self.client.get("/fitnessGoals").json(), [])
        self.create_goal(goalType="Muscle Gain", target=5, timeline="6 months")

        response = self.client.get("/fitnessGoals")
        self.assertEqual(response.status_code, 200)
        self.assertIsInstance(response.json(), list)
        self.assertEqual(len(response.json()), 1)

    def test_listing_is_not_scoped_to_caller(self) -> None:
        self.create_goal(goalType="Muscle Gain", target=5, timeline="6 months")
        self.override(get_current_user_id, "anotherUserId")
        self.create_goal(goalType="Flexibility", target=30, timeline="3 months")

        owners = {goal["userId"] for goal in self.client.get("/fitnessGoals").json()}
        self.assertEqual(owners, {"mockUserId", "anotherUserId"})

    def test_get_goal_by_id(self) -> None:
        goal = self.create_goal(goalType="Muscle Gain", target=5, timeline="6 months")

        response = self.client.get(f"/fitnessGoals/{goal['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), goal)

    def test_get_missing_goal(self) -> None:
        response = self.client.get(f"/fitnessGoals/{MISSING_ID}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Fitness goal not found"})

    def test_update_goal(self) -> None:
        goal = self.create_goal(goalType="Endurance", target=50, timeline="6 months")

        response = self.client.patch(
            f"/fitnessGoals/{goal['id']}",
            json={"target": 60, "timeline": "7 months"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["target"], 60)
        self.assertEqual(body["timeline"], "7 months")
        self.assertEqual(body["goalType"], "Endurance")

    def test_update_is_partial_merge(self) -> None:
        goal = self.create_goal(goalType="Strength", target=100, timeline="8 weeks")

        self.client.patch(f"/fitnessGoals/{goal['id']}", json={"target": 120})
        stored = self.client.get(f"/fitnessGoals/{goal['id']}").json()
        self.assertEqual(stored["target"], 120)
        self.assertEqual(stored["goalType"], "Strength")
        self.assertEqual(stored["timeline"], "8 weeks")
        self.assertEqual(stored["userId"], "mockUserId")

    def test_update_cannot_change_owner(self) -> None:
        goal = self.create_goal(goalType="Strength", target=100, timeline="8 weeks")

        self.client.patch(f"/fitnessGoals/{goal['id']}", json={"userId": "thief"})
        stored = self.client.get(f"/fitnessGoals/{goal['id']}").json()
        self.assertEqual(stored["userId"], "mockUserId")

    def test_update_missing_goal(self) -> None:
        response = self.client.patch(f"/fitnessGoals/{MISSING_ID}", json={"target": 100})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Fitness goal not found"})

    def test_delete_goal(self) -> None:
        goal = self.create_goal(goalType="Flexibility", target=30, timeline="3 months")

        response = self.client.delete(f"/fitnessGoals/{goal['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Fitness goal deleted"})
        self.assertEqual(self.client.get(f"/fitnessGoals/{goal['id']}").status_code, 404)

    def test_delete_missing_goal(self) -> None:
        response = self.client.delete(f"/fitnessGoals/{MISSING_ID}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Fitness goal not found"})

    def test_malformed_id_is_not_found(self) -> None:
        for goal_id in ("not-an-id", "123", "60B6E9E8B6A12345678E9F99", "60b6e9e8b6a12345678e9f9z"):
            with self.subTest(goal_id=goal_id):
                self.assertEqual(self.client.get(f"/fitnessGoals/{goal_id}").status_code, 404)
                self.assertEqual(
                    self.client.patch(f"/fitnessGoals/{goal_id}", json={"target": 1}).status_code,
                    404,
                )
                response = self.client.delete(f"/fitnessGoals/{goal_id}")
                self.assertEqual(response.status_code, 404)
                self.assertEqual(response.json(), {"error": "Fitness goal not found"})

    def test_foreign_goal_is_not_found(self) -> None:
        goal = self.create_goal(goalType="Muscle Gain", target=5, timeline="6 months")
        self.override(get_current_user_id, "anotherUserId")

        self.assertEqual(self.client.get(f"/fitnessGoals/{goal['id']}").status_code, 404)
        self.assertEqual(
            self.client.patch(f"/fitnessGoals/{goal['id']}", json={"target": 1}).status_code,
            404,
        )
        self.assertEqual(self.client.delete(f"/fitnessGoals/{goal['id']}").status_code, 404)

    def test_create_requires_fields(self) -> None:
        response = self.client.post("/fitnessGoals", json={"goalType": "Weight Loss"})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["error"], "Invalid request body")

    def test_create_persistence_failure(self) -> None:
        with patch("fittrack.crud.goal.create_goal", side_effect=SQLAlchemyError("down")):
            response = self.client.post(
                "/fitnessGoals",
                json={"goalType": "Weight Loss", "target": 10, "timeline": "3 months"},
            )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to create fitness goal"})

    def test_list_persistence_failure(self) -> None:
        with patch("fittrack.crud.goal.get_goals", side_effect=SQLAlchemyError("down")):
            response = self.client.get("/fitnessGoals")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to fetch fitness goals"})

    def test_by_id_persistence_failures(self) -> None:
        url = f"/fitnessGoals/{MISSING_ID}"
        cases = (
            ("get_goal", lambda: self.client.get(url), "Failed to fetch fitness goal"),
            ("update_goal", lambda: self.client.patch(url, json={"target": 1}),
             "Failed to update fitness goal"),
            ("delete_goal", lambda: self.client.delete(url), "Failed to delete fitness goal"),
        )
        for name, call, message in cases:
            with self.subTest(operation=name):
                with patch(f"fittrack.crud.goal.{name}", side_effect=SQLAlchemyError("down")):
                    response = call()
                self.assertEqual(response.status_code, 500)
                self.assertEqual(response.json(), {"error": message})

    def test_timestamps_survive_round_trip(self) -> None:
        goal = self.create_goal(goalType="Endurance", target=5, timeline="1 month")
        self.assertTrue(goal["createdAt"])
        updated = self.client.patch(f"/fitnessGoals/{goal['id']}", json={"target": 6}).json()
        self.assertEqual(updated["createdAt"], goal["createdAt"])
        self.assertGreaterEqual(updated["updatedAt"][:19], goal["updatedAt"][:19])


class FitnessGoalWithTokenTestCase(APITestCase):
    def test_goal_owned_by_logged_in_user(self) -> None:
        token = self.signup_and_login()
        user_id = self.client.get("/profile", headers=self.bearer(token)).json()["id"]

        response = self.client.post(
            "/fitnessGoals",
            json={"goalType": "Weight Loss", "target": 10, "timeline": "3 months"},
            headers=self.bearer(token),
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["userId"], user_id)


if __name__ == "__main__":
    unittest.main()
