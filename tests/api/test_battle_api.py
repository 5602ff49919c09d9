from httpx import AsyncClient


async def _post(client: AsyncClient, url: str, payload: dict) -> dict:
    response = await client.post(url, json=payload)
    assert response.status_code in {200, 201}, response.text
    return response.json()["data"]


async def _seed_match(client: AsyncClient, *, with_basic: bool = True) -> tuple[int, int]:
    strike = await _post(client, "/api/skills/", {"name": "Strike", "atk_multiplier": 1.0})
    character = await _post(
        client,
        "/api/characters/",
        {
            "name": "Ember",
            "element": "Fire",
            "hp": 300,
            "atk": 60,
            "defense": 20,
            "spd": 10,
            "basic_attack_id": strike["id"] if with_basic else None,
        },
    )
    await _post(
        client,
        "/api/hero-configs/",
        {"rarity": "common", "team_modifier": 0.15, "team_value": {"1": 5000}},
    )
    await _post(client, "/api/rank-configs/", {"rank": "sentinel", "modifier": 1.0})

    team_ids = []
    for username in ("ayla", "brom"):
        player = await _post(client, "/api/players/", {"username": username})
        hero_ids = [
            (
                await _post(
                    client,
                    "/api/heroes/",
                    {
                        "owner_id": player["id"],
                        "character_id": character["id"],
                        "rarity": "common",
                    },
                )
            )["id"]
            for _ in range(3)
        ]
        team = await _post(
            client,
            "/api/teams/",
            {"name": f"{username}'s", "owner_id": player["id"], "hero_ids": hero_ids},
        )
        assert [member["position"] for member in team["members"]] == [1, 2, 3]
        team_ids.append(team["id"])

    return team_ids[0], team_ids[1]


async def _create_battle(client: AsyncClient, team_ids: tuple[int, int], **extra: str) -> dict:
    teams = [(await client.get(f"/api/teams/{team_id}")).json()["data"] for team_id in team_ids]
    players = [{"player_id": team["owner_id"], "team_id": team["id"]} for team in teams]
    return await _post(client, "/api/battles/", {"players": players, **extra})


async def test_simulate_and_finish(client: AsyncClient) -> None:
    team_a, team_b = await _seed_match(client)

    response = await client.post(
        "/api/battles/simulate", json={"team_a_id": team_a, "team_b_id": team_b}
    )
    assert response.status_code == 201
    battle = response.json()["data"]
    assert battle["status"] == "in_battle"
    assert battle["winner_side"] in {"teamA", "teamB"}
    assert battle["players"][0]["roster"] == [{"rarity": "common", "level": 1}] * 3
    assert {"turn", "attacker", "defender", "skill", "damage", "isCrit", "remainingHp"} <= set(
        battle["log"][0]
    )

    response = await client.post(f"/api/battles/{battle['id']}/finish")
    assert response.status_code == 200
    report = response.json()["data"]
    assert all(result["success"] for result in report["results"])
    assert {result["match_earning"]["game_number"] for result in report["results"]} == {1}

    response = await client.post(f"/api/battles/{battle['id']}/finish")
    assert response.status_code == 409
    assert response.json()["status"] == "error"

    ayla_id = battle["players"][0]["player_id"]
    response = await client.get(f"/api/earnings/{ayla_id}/matches")
    assert [match["game_number"] for match in response.json()["data"]] == [1]

    response = await client.get(f"/api/earnings/{ayla_id}/daily")
    body = response.json()
    assert body["pagination"]["total_items"] == 1
    assert body["data"][0]["heroes_used"] == [{"rarity": "common", "level": 1}] * 3


async def test_create_then_simulate(client: AsyncClient) -> None:
    battle = await _create_battle(client, await _seed_match(client), mode="pve")
    assert battle["status"] == "init_battle"
    assert [player["side"] for player in battle["players"]] == ["teamA", "teamB"]
    assert battle["players"][0]["roster"] is None

    response = await client.post(f"/api/battles/{battle['id']}/simulate")
    assert response.status_code == 200

    response = await client.get(f"/api/battles/{battle['id']}/log")
    assert response.json()["data"][0]["turn"] == 1

    response = await client.get("/api/battles/", params={"mode": "pve"})
    assert response.json()["pagination"]["total_items"] == 1


async def test_missing_basic_attack_is_a_bad_request(client: AsyncClient) -> None:
    battle = await _create_battle(client, await _seed_match(client, with_basic=False))

    response = await client.post(f"/api/battles/{battle['id']}/simulate")

    assert response.status_code == 400
    assert "No skill data found" in response.json()["message"]
    response = await client.get(f"/api/battles/{battle['id']}")
    assert response.json()["data"]["status"] == "init_battle"


async def test_battle_needs_two_players(client: AsyncClient) -> None:
    team_a, _ = await _seed_match(client)

    response = await client.post(
        "/api/battles/", json={"players": [{"player_id": 1, "team_id": team_a}]}
    )

    assert response.status_code == 400
    assert response.json()["status"] == "error"


async def test_unknown_battle(client: AsyncClient) -> None:
    assert (await client.get("/api/battles/999")).status_code == 404
    assert (await client.post("/api/battles/999/finish")).status_code == 404
    assert (await client.delete("/api/battles/999")).status_code == 404


async def test_append_log_entry(client: AsyncClient) -> None:
    battle = await _create_battle(client, await _seed_match(client))

    entry = await _post(
        client,
        f"/api/battles/{battle['id']}/log",
        {
            "turn": 1,
            "attacker": "Ember",
            "defender": "Ember",
            "skill": "Strike",
            "damage": 50,
            "isCrit": True,
            "remainingHp": 250,
        },
    )

    assert entry["isCrit"] is True
    response = await client.get(f"/api/battles/{battle['id']}/log")
    assert response.json()["data"] == [entry]
