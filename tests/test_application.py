import unittest

from cachelib import FileSystemCache

from readability.application import app


class TestApplication(unittest.TestCase):
    def setUp(self):
        app.config["TESTING"] = True
        self.client = app.test_client()

    def test_form(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn(b'name="text"', response.data)

    def test_responses_are_not_cached(self):
        response = self.client.get("/")
        self.assertEqual(response.headers["Cache-Control"],
                         "no-cache, no-store, must-revalidate")
        self.assertEqual(response.headers["Pragma"], "no-cache")

    def test_grades_text(self):
        response = self.client.post("/", data={"text": "Congratulations! Today is your day."})
        self.assertEqual(response.status_code, 200)
        self.assertIn(b"Grade 6", response.data)
        self.assertIn(b"580.00", response.data)

    def test_lines_are_graded_as_one(self):
        response = self.client.post("/", data={"text": "Congratulations!\nToday is your day."})
        self.assertIn(b"Grade 6", response.data)

    def test_missing_text(self):
        self.assertEqual(self.client.post("/", data={}).status_code, 400)
        self.assertEqual(self.client.post("/", data={"text": "   "}).status_code, 400)

    def test_history_most_recent_first(self):
        self.client.post("/", data={"text": "Would you like to play a game?"})
        self.client.post("/", data={"text": "Supercalifragilisticexpialidocious"})
        data = self.client.get("/history").data
        self.assertLess(data.index(b"Supercalifragilisticexpialidocious"),
                        data.index(b"Would you like to play a game?"))

    def test_history_is_capped(self):
        limit = app.config["HISTORY_LIMIT"]
        for i in range(limit + 2):
            self.client.post("/", data={"text": f"Text number x{i}y here."})
        data = self.client.get("/history").data
        self.assertIn(f"x{limit + 1}y".encode(), data)
        self.assertNotIn(b"x0y", data)

    def test_clear(self):
        self.client.post("/", data={"text": "Would you like to play a game?"})
        response = self.client.get("/clear")
        self.assertEqual(response.status_code, 302)
        self.assertNotIn(b"play a game", self.client.get("/history").data)

    def test_sessions_stored_in_cachelib(self):
        self.assertEqual(app.config["SESSION_TYPE"], "cachelib")
        self.assertIsInstance(app.config["SESSION_CACHELIB"], FileSystemCache)

    def test_unknown_page(self):
        self.assertEqual(self.client.get("/missing").status_code, 404)


if __name__ == "__main__":
    unittest.main()
