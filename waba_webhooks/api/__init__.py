"""HTTP ingress for webhook deliveries."""
