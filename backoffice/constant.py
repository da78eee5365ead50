"""Editable static seed data and per-screen list configuration."""

from __future__ import annotations

SCREEN_ORDER: list[str] = ["orders", "bids", "transactions", "withdrawals", "wallets"]

# Raw list configuration consumed by backoffice.data (which wraps these into ListSpec instances).
SCREEN_CONFIG: dict[str, dict[str, object]] = {
    "orders": {
        "title": "Orders",
        "tabs": ["all", "pending", "completed", "cancelled"],
        "search_fields": ["customer_name", "product"],
        "dropdown_field": "payment_method",
        "dropdown_options": ["Credit Card", "PayPal", "Bank Transfer"],
        "page_size": 6,
        "columns": ["customer_name", "product", "amount", "payment_method", "order_date"],
    },
    "bids": {
        "title": "Bidding History",
        "tabs": ["all", "winning", "outbid", "ended"],
        "search_fields": ["bidder_name", "bidder_email", "amount"],
        "dropdown_field": "product",
        "dropdown_options": ["Vintage Rolex Submariner", "Abstract Painting"],
        "page_size": 8,
        "columns": ["bidder_name", "product", "amount", "placed_at"],
    },
    "transactions": {
        "title": "All Transactions",
        "tabs": ["all", "completed", "pending", "failed"],
        "search_fields": ["transaction_id", "user_name", "user_email"],
        "dropdown_field": "payment_method",
        "dropdown_options": ["Bank Transfer", "Wallet Balance", "Credit Card"],
        "page_size": 10,
        "columns": ["transaction_id", "user_name", "type", "amount", "payment_method", "date"],
    },
    "withdrawals": {
        "title": "Withdrawals",
        "tabs": ["all", "pending", "approved", "rejected"],
        "search_fields": ["request_id", "user_name", "user_email"],
        "dropdown_field": "status",
        "dropdown_options": ["pending", "approved", "rejected", "hold", "active"],
        "page_size": 10,
        "columns": ["request_id", "user_name", "amount", "fee", "request_date"],
    },
    "wallets": {
        "title": "User Wallets",
        "tabs": ["all", "active", "frozen"],
        "search_fields": ["user_id", "user_name", "user_email"],
        "dropdown_field": "status",
        "dropdown_options": ["active", "frozen"],
        "page_size": 10,
        "columns": ["user_id", "user_name", "balance", "last_transaction"],
    },
}

ORDER_ROWS: list[dict[str, object]] = [
    {"id": "#001", "customer_name": "Tauseef Ahmed", "product": "Abstract Painting", "amount": 343, "payment_method": "Credit Card", "status": "completed", "order_date": "12 Aug 2025"},
    {"id": "#002", "customer_name": "Qasim Munawar", "product": "Abstract Painting", "amount": 343, "payment_method": "PayPal", "status": "cancelled", "order_date": "12 Aug 2025"},
    {"id": "#003", "customer_name": "Yasir Hafeez", "product": "Abstract Painting", "amount": 343, "payment_method": "Bank Transfer", "status": "cancelled", "order_date": "12 Aug 2025"},
    {"id": "#004", "customer_name": "Junaid Akhtar Butt", "product": "Abstract Painting", "amount": 768, "payment_method": "Bank Transfer", "status": "pending", "order_date": "19 Aug 2025"},
    {"id": "#005", "customer_name": "Tariq Iqbal", "product": "Abstract Painting", "amount": 768, "payment_method": "PayPal", "status": "completed", "order_date": "12 Aug 2025"},
    {"id": "#006", "customer_name": "Muhammed Saeed", "product": "Abstract Painting", "amount": 768, "payment_method": "PayPal", "status": "cancelled", "order_date": "12 Aug 2025"},
    {"id": "#007", "customer_name": "Qasim Munawar", "product": "Abstract Painting", "amount": 768, "payment_method": "Credit Card", "status": "pending", "order_date": "13 Aug 2025"},
    {"id": "#008", "customer_name": "Abdul Rehman", "product": "Abstract Painting", "amount": 768, "payment_method": "Bank Transfer", "status": "completed", "order_date": "12 Aug 2025"},
    {"id": "#009", "customer_name": "Yasir Hafeez", "product": "Abstract Painting", "amount": 768, "payment_method": "Credit Card", "status": "cancelled", "order_date": "12 Aug 2025"},
    {"id": "#010", "customer_name": "Yasir Hafeez", "product": "Abstract Painting", "amount": 768, "payment_method": "Credit Card", "status": "cancelled", "order_date": "12 Aug 2025"},
    {"id": "#011", "customer_name": "Yasir Hafeez", "product": "Abstract Painting", "amount": 768, "payment_method": "Credit Card", "status": "completed", "order_date": "12 Aug 2025"},
    {"id": "#012", "customer_name": "Yasir Hafeez", "product": "Abstract Painting", "amount": 768, "payment_method": "PayPal", "status": "completed", "order_date": "12 Aug 2025"},
    {"id": "#013", "customer_name": "Yasir Hafeez", "product": "Abstract Painting", "amount": 768, "payment_method": "Bank Transfer", "status": "pending", "order_date": "12 Aug 2025"},
    {"id": "#014", "customer_name": "Yasir Hafeez", "product": "Abstract Painting", "amount": 768, "payment_method": "Bank Transfer", "status": "completed", "order_date": "12 Aug 2025"},
    {"id": "#015", "customer_name": "Yasir Hafeez", "product": "Abstract Painting", "amount": 768, "payment_method": "Credit Card", "status": "completed", "order_date": "12 Aug 2025"},
    {"id": "#016", "customer_name": "Yasir Hafeez", "product": "Abstract Painting", "amount": 768, "payment_method": "PayPal", "status": "cancelled", "order_date": "12 Aug 2025"},
    {"id": "#017", "customer_name": "Yasir Hafeez", "product": "Abstract Painting", "amount": 768, "payment_method": "PayPal", "status": "completed", "order_date": "12 Aug 2025"},
    {"id": "#018", "customer_name": "Yasir Hafeez", "product": "Abstract Painting", "amount": 768, "payment_method": "Bank Transfer", "status": "pending", "order_date": "12 Aug 2025"},
]

BID_ROWS: list[dict[str, object]] = [
    {"id": "BID-001", "bidder_name": "Michael Johnson", "bidder_email": "michael.j@email.com", "product": "Vintage Rolex Submariner", "status": "winning", "date": "15/02/2024", "time": "14:30:00", "amount": "$520"},
    {"id": "BID-002", "bidder_name": "Sarah Williams", "bidder_email": "sarah.w@email.com", "product": "Vintage Rolex Submariner", "status": "ended", "date": "10/02/2024", "time": "19:30:00", "amount": "$510"},
    {"id": "BID-003", "bidder_name": "John Smith", "bidder_email": "john.s@email.com", "product": "Vintage Rolex Submariner", "status": "ended", "date": "12/02/2024", "time": "10:15:00", "amount": "$500"},
    {"id": "BID-004", "bidder_name": "Emily Davis", "bidder_email": "emily.d@email.com", "product": "Abstract Painting", "status": "outbid", "date": "08/02/2024", "time": "16:45:00", "amount": "$490"},
    {"id": "BID-005", "bidder_name": "David Brown", "bidder_email": "david.b@email.com", "product": "Abstract Painting", "status": "ended", "date": "14/02/2024", "time": "11:20:00", "amount": "$480"},
    {"id": "BID-006", "bidder_name": "Lisa Anderson", "bidder_email": "lisa.a@email.com", "product": "Abstract Painting", "status": "outbid", "date": "09/02/2024", "time": "13:55:00", "amount": "$470"},
    {"id": "BID-007", "bidder_name": "James Miller", "bidder_email": "james.m@email.com", "product": "Vintage Rolex Submariner", "status": "outbid", "date": "14/02/2024", "time": "09:05:00", "amount": "$465"},
    {"id": "BID-008", "bidder_name": "Robert Taylor", "bidder_email": "robert.t@email.com", "product": "Abstract Painting", "status": "winning", "date": "15/02/2024", "time": "08:40:00", "amount": "$455"},
    {"id": "BID-009", "bidder_name": "Jennifer Martinez", "bidder_email": "jennifer.m@email.com", "product": "Abstract Painting", "status": "outbid", "date": "11/02/2024", "time": "17:10:00", "amount": "$440"},
    {"id": "BID-010", "bidder_name": "Christopher Lee", "bidder_email": "christopher.l@email.com", "product": "Vintage Rolex Submariner", "status": "ended", "date": "07/02/2024", "time": "12:00:00", "amount": "$430"},
]

TRANSACTION_ROWS: list[dict[str, object]] = [
    {"id": "1", "transaction_id": "TXN-2024-001", "user_name": "Michael Johnson", "user_email": "michael.j@email.com", "type": "credit", "amount": "$150.00", "payment_method": "Bank Transfer", "date": "2024-01-20", "status": "pending"},
    {"id": "2", "transaction_id": "TXN-2024-001", "user_name": "Michael Johnson", "user_email": "michael.j@email.com", "type": "debit", "amount": "$150.00", "payment_method": "Wallet Balance", "date": "2024-01-20", "status": "completed"},
    {"id": "3", "transaction_id": "TXN-2024-001", "user_name": "Michael Johnson", "user_email": "michael.j@email.com", "type": "credit", "amount": "$150.00", "payment_method": "Credit Card", "date": "2024-01-20", "status": "pending"},
    {"id": "4", "transaction_id": "TXN-2024-001", "user_name": "Michael Johnson", "user_email": "michael.j@email.com", "type": "debit", "amount": "$150.00", "payment_method": "Wallet Balance", "date": "2024-01-20", "status": "failed"},
    {"id": "5", "transaction_id": "TXN-2024-001", "user_name": "Michael Johnson", "user_email": "michael.j@email.com", "type": "credit", "amount": "$150.00", "payment_method": "Bank Transfer", "date": "2024-01-20", "status": "completed"},
    {"id": "6", "transaction_id": "TXN-2024-002", "user_name": "Sarah Williams", "user_email": "sarah.w@email.com", "type": "credit", "amount": "$200.00", "payment_method": "Credit Card", "date": "2024-01-21", "status": "completed"},
    {"id": "7", "transaction_id": "TXN-2024-003", "user_name": "David Brown", "user_email": "david.b@email.com", "type": "debit", "amount": "$175.00", "payment_method": "Wallet Balance", "date": "2024-01-22", "status": "pending"},
    {"id": "8", "transaction_id": "TXN-2024-004", "user_name": "Emily Davis", "user_email": "emily.d@email.com", "type": "credit", "amount": "$125.00", "payment_method": "Bank Transfer", "date": "2024-01-23", "status": "failed"},
    {"id": "9", "transaction_id": "TXN-2024-005", "user_name": "James Wilson", "user_email": "james.w@email.com", "type": "credit", "amount": "$300.00", "payment_method": "Credit Card", "date": "2024-01-24", "status": "completed"},
    {"id": "10", "transaction_id": "TXN-2024-006", "user_name": "Lisa Anderson", "user_email": "lisa.a@email.com", "type": "debit", "amount": "$100.00", "payment_method": "Wallet Balance", "date": "2024-01-25", "status": "pending"},
    {"id": "11", "transaction_id": "TXN-2024-007", "user_name": "Robert Taylor", "user_email": "robert.t@email.com", "type": "credit", "amount": "$250.00", "payment_method": "Bank Transfer", "date": "2024-01-26", "status": "completed"},
    {"id": "12", "transaction_id": "TXN-2024-008", "user_name": "Jennifer Martinez", "user_email": "jennifer.m@email.com", "type": "debit", "amount": "$180.00", "payment_method": "Credit Card", "date": "2024-01-27", "status": "failed"},
    {"id": "13", "transaction_id": "TXN-2024-009", "user_name": "Christopher Lee", "user_email": "christopher.l@email.com", "type": "credit", "amount": "$220.00", "payment_method": "Wallet Balance", "date": "2024-01-28", "status": "completed"},
    {"id": "14", "transaction_id": "TXN-2024-010", "user_name": "Amanda White", "user_email": "amanda.w@email.com", "type": "credit", "amount": "$190.00", "payment_method": "Bank Transfer", "date": "2024-01-29", "status": "pending"},
    {"id": "15", "transaction_id": "TXN-2024-011", "user_name": "Daniel Harris", "user_email": "daniel.h@email.com", "type": "debit", "amount": "$160.00", "payment_method": "Credit Card", "date": "2024-01-30", "status": "completed"},
    {"id": "16", "transaction_id": "TXN-2024-012", "user_name": "Jessica Clark", "user_email": "jessica.c@email.com", "type": "credit", "amount": "$140.00", "payment_method": "Wallet Balance", "date": "2024-02-01", "status": "failed"},
    {"id": "17", "transaction_id": "TXN-2024-013", "user_name": "Matthew Lewis", "user_email": "matthew.l@email.com", "type": "credit", "amount": "$270.00", "payment_method": "Bank Transfer", "date": "2024-02-02", "status": "completed"},
    {"id": "18", "transaction_id": "TXN-2024-014", "user_name": "Ashley Walker", "user_email": "ashley.w@email.com", "type": "debit", "amount": "$130.00", "payment_method": "Credit Card", "date": "2024-02-03", "status": "pending"},
    {"id": "19", "transaction_id": "TXN-2024-015", "user_name": "Ryan Hall", "user_email": "ryan.h@email.com", "type": "credit", "amount": "$210.00", "payment_method": "Wallet Balance", "date": "2024-02-04", "status": "completed"},
    {"id": "20", "transaction_id": "TXN-2024-016", "user_name": "Nicole Young", "user_email": "nicole.y@email.com", "type": "debit", "amount": "$165.00", "payment_method": "Bank Transfer", "date": "2024-02-05", "status": "failed"},
    {"id": "21", "transaction_id": "TXN-2024-017", "user_name": "Kevin King", "user_email": "kevin.k@email.com", "type": "credit", "amount": "$240.00", "payment_method": "Credit Card", "date": "2024-02-06", "status": "completed"},
    {"id": "22", "transaction_id": "TXN-2024-018", "user_name": "Michelle Wright", "user_email": "michelle.w@email.com", "type": "credit", "amount": "$155.00", "payment_method": "Wallet Balance", "date": "2024-02-07", "status": "pending"},
    {"id": "23", "transaction_id": "TXN-2024-019", "user_name": "Brandon Lopez", "user_email": "brandon.l@email.com", "type": "debit", "amount": "$185.00", "payment_method": "Bank Transfer", "date": "2024-02-08", "status": "completed"},
    {"id": "24", "transaction_id": "TXN-2024-020", "user_name": "Stephanie Hill", "user_email": "stephanie.h@email.com", "type": "credit", "amount": "$195.00", "payment_method": "Credit Card", "date": "2024-02-09", "status": "failed"},
]

WITHDRAWAL_ROWS: list[dict[str, object]] = [
    {"id": "1", "request_id": "WDR-2024-001", "user_name": "Michael Johnson", "user_email": "michael.j@email.com", "amount": "$500.00", "fee": "$5.00", "bank_name": "Chase Bank", "request_date": "2024-01-20", "status": "pending"},
    {"id": "2", "request_id": "WDR-2024-002", "user_name": "Sarah Williams", "user_email": "sarah.w@email.com", "amount": "$750.00", "fee": "$7.50", "bank_name": "Wells Fargo", "request_date": "2024-01-19", "status": "approved"},
    {"id": "3", "request_id": "WDR-2024-003", "user_name": "David Brown", "user_email": "david.b@email.com", "amount": "$300.00", "fee": "$3.00", "bank_name": "Bank of America", "request_date": "2024-01-18", "status": "active"},
    {"id": "4", "request_id": "WDR-2024-004", "user_name": "Emily Davis", "user_email": "emily.d@email.com", "amount": "$1,000.00", "fee": "$10.00", "bank_name": "Citibank", "request_date": "2024-01-17", "status": "rejected"},
    {"id": "5", "request_id": "WDR-2024-005", "user_name": "James Miller", "user_email": "james.m@email.com", "amount": "$250.00", "fee": "$2.50", "bank_name": "Chase Bank", "request_date": "2024-01-16", "status": "hold"},
    {"id": "6", "request_id": "WDR-2024-006", "user_name": "Lisa Anderson", "user_email": "lisa.a@email.com", "amount": "$600.00", "fee": "$6.00", "bank_name": "Wells Fargo", "request_date": "2024-01-15", "status": "approved"},
]

# Generated withdrawals continue the request numbering after the fixed rows.
GENERATED_WITHDRAWAL_COUNT = 24
WITHDRAWAL_STATUS_CYCLE: list[str] = ["pending", "approved", "rejected", "hold", "active"]
WITHDRAWAL_ANCHOR_DATE = "2024-01-14"

WALLET_COUNT = 83
WALLET_ANCHOR_DATE = "2024-03-01"
WALLET_FIRST_NAMES: list[str] = [
    "Michael", "Sarah", "John", "Emily", "Robert", "Jessica", "David", "Lisa",
    "Christopher", "Amanda", "James", "Michelle", "Daniel", "Jennifer", "Kevin",
    "Nicole", "Brian", "Stephanie", "Ryan", "Lauren", "Matthew", "Ashley",
]
WALLET_LAST_NAMES: list[str] = [
    "Johnson", "Williams", "Davis", "Brown", "Miller", "Garcia", "Martinez",
    "Anderson", "Taylor", "Thomas", "Jackson", "White", "Harris", "Martin",
    "Thompson", "Robinson", "Clark", "Rodriguez", "Lewis", "Walker", "Hall",
]
WALLET_BALANCES: list[str] = [
    "$1,245.50", "$850.25", "$2,100.75", "$950.00", "$1,506.80", "$800.00",
    "$1,750.30", "$650.45", "$2,300.00", "$1,100.50", "$1,450.75", "$900.25",
]

# Row actions offered per screen: action id -> (label, resulting status).
ROW_ACTIONS: dict[str, dict[str, tuple[str, str]]] = {
    "withdrawals": {
        "approve": ("Approve request", "approved"),
        "reject": ("Reject request", "rejected"),
        "hold": ("Put on hold", "hold"),
    },
    "wallets": {
        "freeze": ("Freeze wallet", "frozen"),
        "unfreeze": ("Unfreeze wallet", "active"),
    },
    "orders": {
        "complete": ("Mark completed", "completed"),
        "cancel": ("Cancel order", "cancelled"),
    },
}

STATUS_STYLES: dict[str, str] = {
    "completed": "bold #118d57 on #dcf6e5",
    "approved": "bold #118d57 on #dcf6e5",
    "active": "bold #118d57 on #dcf6e5",
    "winning": "bold #118d57 on #dcf6e5",
    "pending": "bold #b76e00 on #fff2d6",
    "hold": "bold #b76e00 on #fff2d6",
    "outbid": "bold #b76e00 on #fff2d6",
    "cancelled": "bold #b71d18 on #ffe4de",
    "rejected": "bold #b71d18 on #ffe4de",
    "failed": "bold #b71d18 on #ffe4de",
    "frozen": "bold #b71d18 on #ffe4de",
    "ended": "bold #ffffff on #637381",
}

INVOICE_SECOND_ITEMS: dict[str, str] = {
    "seed_divisible_by_3": "iPhone 15 Pro Max Case",
    "default": "Protective Phone Case",
}

# Query parameter carrying the dropdown filter for API-backed screens.
API_DROPDOWN_PARAMS: dict[str, str] = {
    "orders": "paymentMethod",
}

# Status an order takes once refunded from the order summary.
REFUND_STATUS = "cancelled"
