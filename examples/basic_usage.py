import json

import jive
from jive import JiveError, new_json_node

sample_repos = """
[
    {"id": 1, "name": "DataScienceRepo", "language": "Python", "stars": 150,
     "owner": {"name": "alice", "active": true}},
    {"id": 2, "name": "WebDevRepo", "language": "JavaScript", "stars": 80,
     "owner": {"name": "bob", "active": false}},
    {"id": 3, "name": "MachineLearning", "language": "Python", "stars": 200,
     "owner": {"name": "carol", "active": true}},
    {"id": 4, "name": "DataVisualization", "language": "R", "stars": 120,
     "owner": {"name": "dave", "active": true}},
    {"id": 5, "name": "EmptyRepo", "language": null, "stars": 0,
     "owner": {"name": "eve", "active": false}}
]
"""

def main():
    repos = jive.execute(json, lambda mapper: new_json_node(mapper.loads(sample_repos)))
    if repos is None:
        print("Error: could not decode repositories")
        return

    try:
        popular_python = jive.filter(
            repos,
            lambda repo: repo.at("/language") == new_json_node("Python") and repo.at("/stars").value > 100,
        )
        print("Filtered Repositories:", [repo.at("/id").value for repo in popular_python])

        total_stars = jive.reduce(repos, 0, lambda acc, repo: acc + repo.at("/stars").value)
        print("Total stars:", total_stars)

        owners = jive.map(repos, lambda repo: repo.at("/owner/name"))
        print("Owners:", owners.to_native())

        summary = jive.pick(jive.last(repos), "id", "name")
        print("Last repository:", summary.to_native())
    except JiveError as e:
        print(f"Error: {e}")

if __name__ == "__main__":
    main()
