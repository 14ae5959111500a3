from snyk_to_sarif.cli import main

if __name__ == "__main__":
    main()
