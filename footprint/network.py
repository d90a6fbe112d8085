"""
Footprint network — NetworkX DiGraph of countries and the centres serving them.

Country and centre nodes are joined by SERVED_BY edges, one per connector,
carrying the great-circle distance. Answers the coverage questions the
map alone doesn't:
  - "Which office countries does the Basingstoke centre serve?"
  - "Which centres serve no office country at all?"
  - "Which connections are the longest hauls?"

Node IDs use type prefixes (country:, centre:) so a country and a centre
sharing a name (Singapore) stay distinct.
"""

import networkx as nx


class FootprintGraph:
    """NetworkX DiGraph built from a MapModel's connectors."""

    def __init__(self, model):
        self._model = model
        self.graph = nx.DiGraph()
        self._build()

    def _build(self):
        g = self.graph

        # ── Centre nodes (all of them, including idle ones) ───────────────
        for center in self._model.centers:
            g.add_node(
                f"centre:{center.name}",
                node_type="centre",
                name=center.name,
                country=center.country,
                coord=center.coord,
            )

        # ── Country nodes + SERVED_BY edges ───────────────────────────────
        for conn in self._model.connectors:
            g.add_node(
                f"country:{conn.country}",
                node_type="country",
                name=conn.country,
                centroid=conn.origin,
                percent=self._model.percents.get(conn.country),
            )
            g.add_edge(
                f"country:{conn.country}", f"centre:{conn.center.name}",
                edge_type="SERVED_BY",
                distance_km=conn.distance_km,
            )

    # ═══════════════════════════════════════════════════════════════════════
    # QUERY METHODS
    # ═══════════════════════════════════════════════════════════════════════

    def get_nodes_by_type(self, node_type: str) -> list[str]:
        """Return node IDs of the given type (country, centre)."""
        return [n for n, d in self.graph.nodes(data=True)
                if d.get("node_type") == node_type]

    def countries_served_by(self, centre_name: str) -> list[str]:
        """Country names whose nearest centre is this one."""
        node = f"centre:{centre_name}"
        if node not in self.graph:
            return []
        return [
            source.replace("country:", "", 1)
            for source, _, attrs in self.graph.in_edges(node, data=True)
            if attrs.get("edge_type") == "SERVED_BY"
        ]

    def centre_load(self) -> dict[str, int]:
        """Centre name → number of office countries it serves (0 for idle centres)."""
        return {
            self.graph.nodes[n]["name"]: self.graph.in_degree(n)
            for n in self.get_nodes_by_type("centre")
        }

    def idle_centres(self) -> list[str]:
        """Centres that are nobody's nearest centre."""
        return [name for name, load in self.centre_load().items() if load == 0]

    def longest_connections(self, n: int = 5) -> list[dict]:
        """Top-n connectors by distance, longest first.

        Returns list of dicts: {country, centre, distance_km}.
        """
        edges = sorted(
            self.graph.edges(data=True),
            key=lambda e: e[2].get("distance_km", 0.0),
            reverse=True,
        )
        return [
            {
                "country": u.replace("country:", "", 1),
                "centre": v.replace("centre:", "", 1),
                "distance_km": round(attrs["distance_km"], 1),
            }
            for u, v, attrs in edges[:n]
        ]
