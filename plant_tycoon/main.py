"""
Main entry point: plays the scripted scenarios and reports.
"""
import logging

from .adapter import ConsoleAdapter
from .analytics import Analytics
from .config import SCENARIO_A, SCENARIO_B, SESSION_TIME
from .session import greedy_strategy, run_session


def run_scenario(scenario_config, show_console=False, duration=SESSION_TIME):
    scenario_name = scenario_config['NAME']
    print(f"\nRunning {scenario_name}...")
    print(f"  Configuration: {scenario_config.get('PLOT_COUNT')} plots")

    adapters = [ConsoleAdapter()] if show_console else []
    return run_session(scenario_config, greedy_strategy, duration, adapters=adapters)


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    analytics = Analytics()

    # Baseline with the console view
    game_a, recorder_a = run_scenario(SCENARIO_A, show_console=True, duration=60000)
    analytics.add_result(SCENARIO_A["NAME"], game_a, recorder_a)

    game_b, recorder_b = run_scenario(SCENARIO_B)
    analytics.add_result(SCENARIO_B["NAME"], game_b, recorder_b)

    # Report
    analytics.print_summary()
    analytics.generate_graphs()
    print("Done.")


if __name__ == "__main__":
    main()
