from pr_review.cli import main

main()
