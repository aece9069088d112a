import logging
from datetime import date

from team_balancer import (
    InMemoryAvailabilityRepository,
    InMemoryMatchRepository,
    InMemoryPlayerRepository,
    TeamGenerator,
)
from team_balancer.scoring import player_stats


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    matches = InMemoryMatchRepository()
    players = InMemoryPlayerRepository(matches)
    availability = InMemoryAvailabilityRepository()
    generator = TeamGenerator(players, matches, availability)

    names = ["Alex", "Ben", "Chen", "Dana", "Eli", "Fran", "Gus", "Hana"]
    roster = {name: players.create(name) for name in names}
    for player in roster.values():
        availability.update(player.id, True)
    availability.update(roster["Hana"].id, False)

    history = [
        (date(2024, 3, 2), {"Alex": 9, "Ben": 4, "Chen": 7}, {"Dana": 6, "Eli": 3, "Fran": 8}),
        (date(2024, 3, 9), {"Alex": 8, "Dana": 5, "Eli": 4}, {"Ben": 5, "Chen": 6, "Fran": 9}),
        (date(2024, 3, 16), {"Alex": 10, "Fran": 7, "Gus": 2}, {"Ben": 3, "Dana": 6, "Eli": 5}),
    ]
    for played_on, team_a, team_b in history:
        entries = [{"player_id": roster[n].id, "score": s, "team": "A"} for n, s in team_a.items()]
        entries += [{"player_id": roster[n].id, "score": s, "team": "B"} for n, s in team_b.items()]
        matches.create(played_on, 3, entries)

    print("Roster:")
    participations = matches.participations()
    for player in players.list():
        stats = player_stats(player.id, participations)
        print(f"{player.name:>6}: {stats.matches_played} played, avg {stats.average_points:.1f}")

    result = generator.generate(3)
    for label, team in (("A", result.team_a), ("B", result.team_b)):
        members = ", ".join(f"{p.display_name} ({p.average_score:.1f})" for p in team.members)
        print(f"Team {label}: {members}  total={team.total_score:.1f}")
    print(f"Gap: {result.gap:.2f}")


if __name__ == "__main__":
    main()
