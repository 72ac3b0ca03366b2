#!/usr/bin/env python3
"""
Unit tests for the queue visualizer Flask API.
Run with:  python -m unittest test_app.py
"""

import threading
import unittest

from app import (
    DEFAULT_QUEUE_CAPACITY, MAX_QUEUE_CAPACITY, app, get_session,
    load_queue_config, reset_session
)


# ---------------------------------------
# Test Configuration
# ---------------------------------------
class QueueApiTestCase(unittest.TestCase):
    def setUp(self):
        app.config["TESTING"] = True
        app.config["QUEUE_KIND"] = "linear"
        app.config["QUEUE_CAPACITY"] = 3
        reset_session()
        self.client = app.test_client()

    def enqueue(self, value):
        return self.client.post("/api/queue/enqueue", json={"value": value})

    # ---------------------------------------
    # State routes
    # ---------------------------------------
    def test_get_queue(self):
        resp = self.client.get("/api/queue")
        self.assertEqual(resp.status_code, 200)
        data = resp.get_json()
        self.assertEqual(data["queue"]["kind"], "linear")
        self.assertEqual(data["queue"]["capacity"], 3)
        self.assertEqual(data["message"], "Linear queue active - FIFO mode")
        self.assertEqual(resp.headers["Access-Control-Allow-Origin"], "*")

    def test_home_route(self):
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("queue", resp.get_json())

    def test_reset(self):
        resp = self.client.post("/api/queue/reset", json={"kind": "circular", "capacity": 5})
        self.assertEqual(resp.status_code, 200)
        queue = resp.get_json()["queue"]
        self.assertEqual(queue["kind"], "circular")
        self.assertEqual(queue["capacity"], 5)

    def test_reset_rejects_bad_input(self):
        resp = self.client.post("/api/queue/reset", json={"kind": "stack"})
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post("/api/queue/reset", json={"capacity": 0})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.get_json())

        for capacity in (MAX_QUEUE_CAPACITY + 1, 10**12):
            resp = self.client.post(
                "/api/queue/reset", json={"kind": "circular", "capacity": capacity}
            )
            self.assertEqual(resp.status_code, 400)
            self.assertIn("at most", resp.get_json()["error"])
        # the previous session is untouched
        self.assertEqual(get_session().kind, "linear")
        self.assertEqual(get_session().capacity, 3)

    def test_reset_accepts_max_capacity(self):
        resp = self.client.post("/api/queue/reset", json={"capacity": MAX_QUEUE_CAPACITY})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json()["queue"]["capacity"], MAX_QUEUE_CAPACITY)

    # ---------------------------------------
    # Configuration
    # ---------------------------------------
    def test_load_queue_config(self):
        self.assertEqual(load_queue_config({}), ("linear", DEFAULT_QUEUE_CAPACITY))
        self.assertEqual(
            load_queue_config({"QUEUE_KIND": "circular", "QUEUE_CAPACITY": "25"}),
            ("circular", 25),
        )

    def test_load_queue_config_falls_back_on_bad_values(self):
        for environ in (
            {"QUEUE_KIND": "stack"},
            {"QUEUE_CAPACITY": "lots"},
            {"QUEUE_CAPACITY": "0"},
            {"QUEUE_CAPACITY": str(MAX_QUEUE_CAPACITY + 1)},
        ):
            self.assertEqual(load_queue_config(environ), ("linear", DEFAULT_QUEUE_CAPACITY))

    # ---------------------------------------
    # Operation routes
    # ---------------------------------------
    def test_enqueue_and_dequeue(self):
        resp = self.enqueue("A")
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.get_json()["message"], 'Element "A" added to the queue')
        self.enqueue("B")

        resp = self.client.post("/api/queue/dequeue")
        self.assertEqual(resp.status_code, 200)
        data = resp.get_json()
        self.assertEqual(data["value"], "A")
        self.assertEqual(data["queue"]["size"], 1)

    def test_enqueue_strips_and_accepts_form(self):
        self.enqueue("  padded  ")
        resp = self.client.post("/api/queue/enqueue", data={"value": "form"})
        self.assertEqual(resp.status_code, 201)
        values = [e["value"] for e in resp.get_json()["queue"]["elements"]]
        self.assertEqual(values, ["padded", "form"])

    def test_enqueue_requires_value(self):
        for body in ({}, {"value": ""}, {"value": "   "}):
            resp = self.client.post("/api/queue/enqueue", json=body)
            self.assertEqual(resp.status_code, 400)
            self.assertEqual(resp.get_json()["error"], "Enter a value before adding")
        self.assertTrue(get_session().queue.is_empty())

    def test_overflow(self):
        for value in "ABC":
            self.enqueue(value)
        resp = self.enqueue("D")
        self.assertEqual(resp.status_code, 409)
        data = resp.get_json()
        self.assertEqual(data["kind"], "overflow")
        self.assertEqual(data["error"], "Overflow: the queue is full")
        self.assertEqual(data["queue"]["size"], 3)

    def test_underflow_and_empty_reads(self):
        resp = self.client.post("/api/queue/dequeue")
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.get_json()["kind"], "underflow")

        for route in ("/api/queue/front", "/api/queue/rear"):
            resp = self.client.get(route)
            self.assertEqual(resp.status_code, 409)
            self.assertEqual(resp.get_json()["kind"], "empty")

    def test_front_rear_size(self):
        for value in "ABC":
            self.enqueue(value)
        self.assertEqual(self.client.get("/api/queue/front").get_json()["value"], "A")
        self.assertEqual(self.client.get("/api/queue/rear").get_json()["value"], "C")
        data = self.client.get("/api/queue/size").get_json()
        self.assertEqual(data["size"], 3)
        self.assertEqual(data["message"], "Current queue size: 3 element(s)")

    def test_clear(self):
        self.enqueue("A")
        resp = self.client.post("/api/queue/clear")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.get_json()["queue"]["is_empty"])
        self.assertEqual(self.enqueue("B").status_code, 201)

    # ---------------------------------------
    # Mode routes
    # ---------------------------------------
    def test_toggle_mode(self):
        for value in "ABC":
            self.enqueue(value)
        resp = self.client.post("/api/queue/toggle-mode")
        data = resp.get_json()
        self.assertEqual(data["message"], "Mode changed to LIFO (Last-In-First-Out)")
        self.assertEqual(data["queue"]["mode"], "LIFO")

        resp = self.client.post("/api/queue/toggle-mode")
        self.assertEqual(resp.get_json()["queue"]["mode"], "FIFO")
        self.assertEqual(self.client.post("/api/queue/dequeue").get_json()["value"], "A")

    def test_toggle_kind(self):
        self.enqueue("A")
        self.client.post("/api/queue/toggle-mode")
        resp = self.client.post("/api/queue/toggle-kind")
        data = resp.get_json()
        self.assertEqual(data["queue"]["kind"], "circular")
        self.assertEqual(data["queue"]["mode"], "LIFO")
        self.assertTrue(data["queue"]["is_empty"])
        self.assertEqual(data["message"], "Circular queue active - LIFO mode")

    def test_concurrent_enqueues_respect_capacity(self):
        statuses = []

        def worker(value):
            client = app.test_client()
            statuses.append(client.post("/api/queue/enqueue", json={"value": value}).status_code)

        threads = [threading.Thread(target=worker, args=(f"v{i}",)) for i in range(12)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(statuses.count(201), 3)
        self.assertEqual(statuses.count(409), 9)
        self.assertEqual(get_session().queue.size(), 3)

    def test_circular_lifo_scenario(self):
        self.client.post("/api/queue/toggle-kind")
        self.client.post("/api/queue/toggle-mode")
        for value in "ABC":
            self.enqueue(value)
        self.assertEqual(self.client.post("/api/queue/dequeue").get_json()["value"], "C")
        self.assertEqual(self.client.get("/api/queue/front").get_json()["value"], "B")


if __name__ == "__main__":
    unittest.main(verbosity=2)
