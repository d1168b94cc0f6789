import importlib.util
import tempfile
import unittest
from pathlib import Path

HAS_WEB = importlib.util.find_spec("fastapi") is not None and importlib.util.find_spec("httpx") is not None


@unittest.skipUnless(HAS_WEB, "web extra not installed")
class TestWebApi(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        from fastapi.testclient import TestClient

        from wordgraph.web.server import create_app

        cls._td = tempfile.TemporaryDirectory()
        corpus = Path(cls._td.name) / "corpus.txt"
        corpus.write_text("the quick dog\nthe fat dog\n", encoding="utf-8")
        cls.client = TestClient(create_app(corpus_path=str(corpus)))

    @classmethod
    def tearDownClass(cls):
        cls._td.cleanup()

    def test_stats_and_graph(self):
        r = self.client.get("/api/stats")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["stats"]["unique_nodes"], 4)

        edges = self.client.get("/api/graph").json()["edges"]
        self.assertIn({"source": "dog", "target": "the", "weight": 1}, edges)

    def test_bridge(self):
        data = self.client.get("/api/bridge", params={"a": "the", "b": "dog"}).json()
        self.assertEqual(data["result"]["words"], ["quick", "fat"])

        r = self.client.get("/api/bridge", params={"a": "the", "b": "cat"})
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.json()["result"]["message"], "No cat in the graph!")

    def test_path_and_dot(self):
        data = self.client.get("/api/path", params={"a": "quick", "b": "fat"}).json()
        self.assertEqual(data["result"]["path"], ["quick", "dog", "the", "fat"])
        self.assertEqual(data["result"]["distance"], 3)

        dot = self.client.get("/api/graph.dot", params={"a": "quick", "b": "fat"}).text
        self.assertIn('"dog" -> "the" [label="1", color=', dot)

    def test_augment_and_walk(self):
        data = self.client.post("/api/augment", json={"text": "the dog", "seed": 5}).json()
        self.assertIn(data["text"], ("the quick dog", "the fat dog"))
        self.assertEqual(len(data["insertions"]), 1)

        w1 = self.client.post("/api/walk", json={"seed": 9}).json()["walk"]
        w2 = self.client.post("/api/walk", json={"seed": 9}).json()["walk"]
        self.assertEqual(w1, w2)
        self.assertGreaterEqual(len(w1), 1)

    def test_bad_seed_is_a_client_error(self):
        for body in ({"seed": "abc"}, {"seed": 1.5}, {"seed": True}):
            r = self.client.post("/api/walk", json=body)
            self.assertEqual(r.status_code, 400, body)
            self.assertFalse(r.json()["ok"])
            self.assertIn("seed", r.json()["error"])

        r = self.client.post("/api/augment", json={"text": "the dog", "seed": "abc"})
        self.assertEqual(r.status_code, 400)

        r = self.client.post("/api/walk", json={"seed": "12"})
        self.assertEqual(r.status_code, 200)


@unittest.skipUnless(HAS_WEB, "web extra not installed")
class TestWebApiServerSeed(unittest.TestCase):
    def test_null_seed_uses_server_seed(self):
        from fastapi.testclient import TestClient

        from wordgraph.web.server import create_app

        with tempfile.TemporaryDirectory() as td:
            corpus = Path(td) / "corpus.txt"
            corpus.write_text("a b c a c b a\n", encoding="utf-8")
            client = TestClient(create_app(corpus_path=str(corpus), seed=9))
            explicit = client.post("/api/walk", json={"seed": 9}).json()["walk"]
            self.assertEqual(client.post("/api/walk", json={"seed": None}).json()["walk"], explicit)
            self.assertEqual(client.post("/api/walk", json={}).json()["walk"], explicit)


if __name__ == "__main__":
    unittest.main()
