import runpy
import traceback

def main():
    try:
        # Equivalent to: python -m radmon.dev.demo_alarm
        runpy.run_module("radmon.dev.demo_alarm", run_name="__main__")
    except Exception:
        traceback.print_exc()
        input("\nPress Enter to exit...")

if __name__ == "__main__":
    main()
