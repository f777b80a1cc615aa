from currency_converter.menu.main import main

if __name__ == "__main__":
    main()
