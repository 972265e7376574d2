"""Example 1: Technology Competition in a Subsector

This example demonstrates how to:
1. Create technologies competing to produce electricity
2. Run one cost, share and production pass
3. Add a fixed-output technology
4. Report fuel use and emissions as a DataFrame
"""

import logging

from techchoice import (
    CO2Emissions,
    DependencyFinder,
    EmissionsReportVisitor,
    InMemoryMarketplace,
    ModelContext,
    Subsector,
    Technology,
    TechnologyParameters,
)
from techchoice.emissions import CO2_COEF_KEY

REGION = "USA"
SECTOR = "electricity"


def build_marketplace() -> InMemoryMarketplace:
    """Create fuel, carbon and electricity markets for period 0."""
    marketplace = InMemoryMarketplace()
    marketplace.create_market("coal", REGION, 0, price=1.5)
    marketplace.create_market("gas", REGION, 0, price=4.0)
    marketplace.create_market("CO2", REGION, 0, price=20.0)
    marketplace.create_market(SECTOR, REGION, 0, price=0.0)
    marketplace.get_market_info("coal", REGION, 0).set_double(CO2_COEF_KEY, 0.0258)
    marketplace.get_market_info("gas", REGION, 0).set_double(CO2_COEF_KEY, 0.0147)
    return marketplace


def main():
    """Run one period of technology competition."""
    logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

    print("=" * 70)
    print("Example 1: Technology Competition in a Subsector")
    print("=" * 70)

    marketplace = build_marketplace()
    context = ModelContext(marketplace=marketplace)

    print("\n" + "-" * 70)
    print("Step 1: Define Technologies")
    print("-" * 70)

    coal = Technology(
        name="coal_steam",
        year=2005,
        parameters=TechnologyParameters(
            name="coal_steam", fuel_name="coal", efficiency=0.38, non_energy_cost=1.2
        ),
        ghgs=[CO2Emissions()],
    )
    gas = Technology(
        name="gas_cc",
        year=2005,
        parameters=TechnologyParameters(
            name="gas_cc", fuel_name="gas", efficiency=0.55, non_energy_cost=0.8
        ),
    )
    wind = Technology(
        name="wind",
        year=2005,
        fixed_output=15.0,
        parameters=TechnologyParameters(
            name="wind", fuel_name="renewable", efficiency=1.0, non_energy_cost=3.0
        ),
    )

    subsector = Subsector(
        name="generation",
        sector_name=SECTOR,
        region_name=REGION,
        technologies=[coal, gas, wind],
    )
    finder = DependencyFinder()
    subsector.complete_init(context, dependency_finder=finder)
    print(f"\nSector {SECTOR} depends on: {sorted(finder.get_dependencies(SECTOR))}")

    print("\n" + "-" * 70)
    print("Step 2: Cost, Share and Production")
    print("-" * 70)

    shares = subsector.run_period(demand=100.0, period=0)
    for tech, share in zip(subsector.technologies, shares):
        print(
            f"  {tech.name:<12} cost={tech.get_total_cost():8.3f} "
            f"share={share:6.3f} output={tech.get_output(0):7.2f}"
        )

    print("\n" + "-" * 70)
    print("Step 3: Report")
    print("-" * 70)

    report = EmissionsReportVisitor()
    subsector.accept(report, 0)
    print()
    print(report.to_frame().to_string(index=False))
    print(f"\nTotal CO2: {report.total_emissions('CO2'):.3f}")

    print("\nMarkets:")
    print(marketplace.to_frame().to_string(index=False))

    print("\n" + "=" * 70)
    print("Example completed successfully!")
    print("=" * 70)

    return subsector


if __name__ == "__main__":
    subsector = main()
