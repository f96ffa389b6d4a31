from contextgraph import ContextGraphApp, configure_logging

configure_logging("INFO")

# --------------------------------
# Start session
# --------------------------------

session = ContextGraphApp.create()

print("\n=== Onboarding Start ===\n")
print(session.messages[0].text)

# --------------------------------
# Fill the wizard
# --------------------------------

session.update_org(name="Atlantic Records", license="Enterprise", country="USA", domain="Label")
session.update_team(dept="Marketing", kpis="Streams, Saves")
session.update_user(name="Ada Park", email="ada@atlantic.example", title="Director")
session.set_naming(org="ORG:{Company}", team="TEAM:{Dept}", user="USER:{First}.{Last}")

for step in ("team", "user", "connectors", "semantic", "artists"):
    session.go_to(step)
    print(f"[{step}] {session.nudge()}")

session.simulate_deep_research()
print(f"\nCompletion: {session.completion()}%")

# --------------------------------
# Seed + enrich
# --------------------------------

graph = session.finalize()
session.enrich_tick()

print("\n--- Ranked Nodes ---")
for node in graph.ranked():
    print(f"Type={node.type.value}, Name={node.name}, Score={node.ranking.score}")

print("\n--- Why team.name? ---")
for ev in session.why("team.name"):
    print(f"{ev.source} {ev.signal} ({ev.confidence:.0%}) -> {ev.action}")

print("\n=== Export ===\n")
print(session.export().to_json())
