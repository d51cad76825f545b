import uuid

from locust import HttpUser, task, between


class WriterUser(HttpUser):
    wait_time = between(1, 3)

    def on_start(self):
        self.headers = {"X-User-Id": f"load-{uuid.uuid4()}"}
        r = self.client.post("/api/scripts", json={"title": "Load Test"}, headers=self.headers)
        self.script_id = r.json()["data"]["script"]["id"]

    @task(3)
    def list_scripts(self):
        self.client.get("/api/scripts", headers=self.headers)

    @task(2)
    def list_versions(self):
        self.client.get(
            f"/api/scripts/{self.script_id}/versions",
            headers=self.headers,
            name="/api/scripts/[id]/versions",
        )

    @task(1)
    def create_version(self):
        data = {"raw_content": "INT. LOAD LAB - DAY", "version_label": "bench"}
        self.client.post(
            f"/api/scripts/{self.script_id}/versions",
            json=data,
            headers=self.headers,
            name="/api/scripts/[id]/versions",
        )
