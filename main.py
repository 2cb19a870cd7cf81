from decimal_clock.app import main

if __name__ == "__main__":
    main()
