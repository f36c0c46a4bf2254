"""
Session statistics and graphs.
"""
import matplotlib.pyplot as plt
import pandas as pd
import os
import numpy as np

from .adapter import PresentationAdapter

COLUMNS = ["time", "event", "balance", "seeds", "occupied_plots", "nursery_size", "sale_value"]


class SessionRecorder(PresentationAdapter):
    """
    Adapter that keeps one row per notification.
    """
    def __init__(self):
        self.rows = []
        self.rejections = 0

    def on_state_changed(self, event, view, detail=None):
        sale_value = detail.value if event == "sold" else None
        self.rows.append({
            "time": view.time,
            "event": event,
            "balance": view.balance,
            "seeds": view.total_seeds,
            "occupied_plots": view.occupied_plots,
            "nursery_size": len(view.nursery),
            "sale_value": sale_value,
        })

    def on_error(self, result):
        self.rejections += 1

    def to_frame(self):
        return pd.DataFrame(self.rows, columns=COLUMNS)


class Analytics:
    def __init__(self):
        self.results = {}  # {scenario_name: stats_dict}

    def add_result(self, scenario_name, game, recorder):
        df = recorder.to_frame()
        sales = df.loc[df["event"] == "sold", "sale_value"].dropna().astype(float)
        starting = game.settings["STARTING_BALANCE"]
        stats = {
            "final_balance": game.balance,
            "profit": game.balance - starting,
            "plants_sold": int(len(sales)),
            "avg_sale_value": float(np.mean(sales)) if len(sales) else 0.0,
            "peak_balance": int(df["balance"].max()) if len(df) else game.balance,
            "rejected_intents": recorder.rejections,
            "timeline": df[["time", "balance"]],
        }
        self.results[scenario_name] = stats
        return stats

    def print_summary(self):
        print("\n=== SESSION RESULTS ===")
        for name, stats in self.results.items():
            print(f"Scenario: {name}")
            print(f"  - Final Balance: {stats['final_balance']}")
            print(f"  - Profit: {stats['profit']}")
            print(f"  - Plants Sold: {stats['plants_sold']}")
            print(f"  - Avg Sale Value: {stats['avg_sale_value']:.1f}")
            print(f"  - Peak Balance: {stats['peak_balance']}")
            print("-" * 30)

    def generate_graphs(self, output_dir="results"):
        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

        scenarios = list(self.results.keys())
        sold = [self.results[s]["plants_sold"] for s in scenarios]

        # 1. Balance over time
        plt.figure(figsize=(10, 6))
        for name in scenarios:
            timeline = self.results[name]["timeline"]
            plt.step(timeline["time"] / 1000, timeline["balance"], where="post", label=name)
        plt.title('Balance over Time')
        plt.xlabel('Seconds')
        plt.ylabel('Money')
        plt.legend()
        plt.savefig(f"{output_dir}/balance_over_time.png")
        plt.close()

        # 2. Plants sold
        plt.figure(figsize=(10, 6))
        plt.bar(scenarios, sold, color='green')
        plt.title('Plants Sold')
        plt.ylabel('Plants')
        plt.savefig(f"{output_dir}/plants_sold.png")
        plt.close()

        print(f"Graphs saved to {os.path.abspath(output_dir)}")
        return output_dir
