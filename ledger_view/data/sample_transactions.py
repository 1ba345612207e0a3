# ledger_view/data/sample_transactions.py

# Raw records as delivered by the in-memory data source.
SAMPLE_TRANSACTIONS: list[dict] = [
    {"id": 1, "date": "01-01-2025", "remark": "Salary", "amount": 3000, "currency": "USD", "type": "Credit"},
    {"id": 2, "date": "02-01-2025", "remark": "Groceries", "amount": -150, "currency": "USD", "type": "Debit"},
    {"id": 3, "date": "03-01-2025", "remark": "Gym Membership", "amount": -50, "currency": "USD", "type": "Debit"},
    {"id": 4, "date": "04-01-2025", "remark": "Dinner", "amount": -40, "currency": "USD", "type": "Debit"},
    {"id": 5, "date": "05-01-2025", "remark": "Movie Tickets", "amount": -30, "currency": "USD", "type": "Debit"},
    {"id": 6, "date": "06-01-2025", "remark": "Rent", "amount": -1200, "currency": "USD", "type": "Debit"},
    {"id": 7, "date": "07-01-2025", "remark": "Utilities", "amount": -100, "currency": "USD", "type": "Debit"},
    {"id": 8, "date": "08-01-2025", "remark": "Car Payment", "amount": -400, "currency": "USD", "type": "Debit"},
    {"id": 9, "date": "09-01-2025", "remark": "Insurance", "amount": -200, "currency": "USD", "type": "Debit"},
    {"id": 10, "date": "10-01-2025", "remark": "Freelance Work", "amount": 1250.5, "currency": "USD", "type": "Credit"},
    {"id": 11, "date": "15-02-2025", "remark": "Consulting Invoice", "amount": 2000, "currency": "EUR", "type": "Credit"},
    {"id": 12, "date": "28-02-2025", "remark": "", "amount": -75.25, "currency": "GBP", "type": "Debit"},
]
