SERVICE_NAME = "gql-transport"
