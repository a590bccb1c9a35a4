from jls_railroad.cli import main

if __name__ == "__main__":
    main()
