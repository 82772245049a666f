"""Pipeline planner: sites on a plane, weighted links and minimum spanning trees."""
